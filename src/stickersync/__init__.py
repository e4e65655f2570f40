# src/stickersync/__init__.py
