"""
Client package for the starter web stack.

Holds the session provider shared by every view, a path router, the home
view that loads the user list from the API server, and a text renderer used
by the command-line entry point.
"""
