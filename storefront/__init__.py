"""Storefront application-service layer."""
