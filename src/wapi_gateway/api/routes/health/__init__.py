"""Rotas de descrição da API e health check."""
