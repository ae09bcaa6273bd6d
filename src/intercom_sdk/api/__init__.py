"""Camada de borda com a API Intercom: clients, conectores, validação e payloads."""
