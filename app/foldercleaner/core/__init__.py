"""Core services: configuration, paths, routines, scheduling and theming."""
