"""Rendering collaborator and shape models."""

from gravity_field.render.base import Renderer
from gravity_field.render.renderer_2d import Renderer2D
from gravity_field.render.shapes import Shape, circle_shape, square_shape, transformed_vertices

__all__ = ["Renderer", "Renderer2D", "Shape", "circle_shape", "square_shape", "transformed_vertices"]
