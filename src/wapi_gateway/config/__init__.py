"""Configuração do wapi_gateway: settings por domínio e logging estruturado."""
