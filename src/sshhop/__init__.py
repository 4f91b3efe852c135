"""sshhop - look up server aliases and dispatch to ssh, scp and sshfs."""

__version__ = "0.1.0"

__all__ = ["__version__"]
