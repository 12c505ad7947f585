"""Installer and updater for Minecraft game files: version data, Java runtime, libraries, assets, log config and client jar."""

__version__ = "0.1.0"