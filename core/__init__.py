"""Storefront orders core: domain, application, data and infrastructure layers."""
