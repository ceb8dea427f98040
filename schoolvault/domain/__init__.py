"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and domain events.
The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Accounts, students, memberships (have identity)
- value_objects/: Actor, ResourceRef, TrashState, AuthorizationDecision
- protocols/: Repository, policy and service ports
- events/: Lifecycle and membership events
"""
