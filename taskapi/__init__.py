"""Task Manager API - task tracking service with JWT authentication."""
