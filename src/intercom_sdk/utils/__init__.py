"""Utilitários compartilhados do SDK."""
