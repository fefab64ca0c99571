"""Rotas de envio de mensagens."""
