"""Shell plugin scaffold.

Interactive generator for the source files of new credential-provider
(shell) plugins.
"""

__version__ = "0.1.0"
