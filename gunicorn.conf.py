"""
Gunicorn settings for the Project Tracker API.

  gunicorn -c gunicorn.conf.py project_tracker.main:app

PORT and WORKERS may be set in the environment.
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"
workers = int(os.environ.get("WORKERS", "2"))
worker_class = "uvicorn.workers.UvicornWorker"

# Every endpoint answers immediately; a slow request means a stuck worker.
timeout = 30
graceful_timeout = 10
keepalive = 5

loglevel = "info"
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'
