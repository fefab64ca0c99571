"""Rotas de grupos."""
