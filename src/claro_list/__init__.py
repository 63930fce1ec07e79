"""Claro-List: folders of tasks persisted as one local JSON document."""

__version__ = "0.1.0"
