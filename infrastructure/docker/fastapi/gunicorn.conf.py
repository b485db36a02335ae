"""
Gunicorn configuration for the Virtual SA service
"""

import os

wsgi_app = "virtual_sa.main:app"

# Server socket
bind = f"{os.getenv('HOST', '0.0.0.0')}:{os.getenv('PORT', '8001')}"
backlog = 2048

# Single worker process: generation tokens for stale-response checks are held
# in memory, so every request of a session must reach the same process.
# Scale out with more containers behind a session-affine balancer.
workers = 1
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
# No periodic recycling; a restart would reset the token counters
max_requests = 0
preload_app = True
keepalive = 2

# Architecture generation can take over a minute upstream
timeout = 150
graceful_timeout = 30

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv('LOG_LEVEL', 'info').lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = 'virtual_sa'

# Server mechanics
daemon = False
pidfile = '/tmp/gunicorn_virtual_sa.pid'
tmp_upload_dir = None

# Development settings (overridden by environment)
if os.getenv('DEBUG', 'False').lower() == 'true':
    reload = True
    loglevel = 'debug'


def when_ready(server):
    """Called just after the server is started."""
    server.log.info("Virtual SA is ready. Spawning workers")


def worker_int(worker):
    """Called just after a worker exited on SIGINT or SIGQUIT."""
    worker.log.info("Virtual SA worker received INT or QUIT signal")


def post_fork(server, worker):
    """Called just after a worker has been forked."""
    server.log.info("Virtual SA worker spawned (pid: %s)", worker.pid)
