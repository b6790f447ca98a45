"""
vvp2 - a command-line client for the Ververica Platform.

The CLI talks to the platform REST API and covers:
- Deployments, deployment defaults and deployment targets
- Namespaces, session clusters and secret values
- Jobs and savepoints
- Platform status and resource usage reports
"""

__version__ = "0.1.0"
__app_name__ = "vvp2"

# Build metadata, unset in development checkouts
__commit__ = "none"
__build_time__ = "unknown"
