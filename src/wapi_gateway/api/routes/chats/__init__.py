"""Rotas de chats."""
