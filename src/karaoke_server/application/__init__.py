"""
Application Layer

Contains application services that validate client input, orchestrate
domain objects and infrastructure, and log every state change.
"""
