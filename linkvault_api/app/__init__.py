"""
Application package initializer.

The project is organised into logical pieces: ``core`` (settings,
logging, errors, JSON storage), ``schemas`` (request and response
models), ``services`` (business logic) and ``api`` (routers).  The
application itself is assembled in ``main``.
"""
