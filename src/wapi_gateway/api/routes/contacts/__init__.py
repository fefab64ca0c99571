"""Rotas de contatos."""
