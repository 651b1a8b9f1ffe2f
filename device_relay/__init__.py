"""
Device relay: telemetry ingestion and command relay for networked devices.
"""

__version__ = "1.1.0"
