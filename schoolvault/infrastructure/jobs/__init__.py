"""Externally scheduled jobs (cron, Kubernetes CronJob, ...)."""
