"""Rotas de instância (status, QR code, conexão)."""
