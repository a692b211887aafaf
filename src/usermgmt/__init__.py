"""usermgmt - user profile and role management backend."""

__version__ = "0.1.0"
