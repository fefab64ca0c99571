"""Camada de aplicação: serviço W-API, bootstrap e entrypoint do proxy."""
