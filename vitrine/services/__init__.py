"""Serviços HTTP da aplicação Vitrine."""
