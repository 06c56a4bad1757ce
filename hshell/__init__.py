"""A small interactive command shell with cd, env, setenv, unsetenv and exit built-ins."""

__version__ = "0.1.0"