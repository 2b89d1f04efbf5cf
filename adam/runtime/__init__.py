"""Runtime support: errors, logging and environment configuration."""
