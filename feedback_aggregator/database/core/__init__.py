"""
Service layer: `funcs` exposes the operations the HTTP router calls, each run
inside a `@transactional` session.
"""
