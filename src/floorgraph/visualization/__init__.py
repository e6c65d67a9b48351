"""Visualization module for floorplans.

This module provides functionality to render floorplans to images.
"""

from .generator import generate_floorplan_image

__all__ = ["generate_floorplan_image"]
