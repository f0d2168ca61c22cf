"""Core del cliente: configuración, dominio, contratos y servicios por recurso."""
