"""Envs module - application and device variable models and listing."""
