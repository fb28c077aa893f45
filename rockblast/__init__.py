"""Rock Blast: a cannon-versus-bouncing-rocks arcade simulation."""

__version__ = "0.1.0"
