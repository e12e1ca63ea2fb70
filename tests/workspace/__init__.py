"""Workspace tests: discovery, configuration, service, watcher."""
