"""Camada API: conector HTTP da W-API, normalizers, aliases e rotas do proxy."""
