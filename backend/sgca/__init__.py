"""Sistema de Gestión y Control de Accesos: administrative REST backend."""

__version__ = "1.0.0"
