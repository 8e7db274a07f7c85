"""camellint: camelCase identifier checks over ESTree syntax trees."""

__version__ = "0.1.0"
