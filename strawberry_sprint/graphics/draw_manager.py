"""
draw_manager.py
---------------
Draws a Stage's node tree onto a pygame surface.

Responsibilities:
- Load and cache sprite images (placeholders when files are missing)
- Cache scaled/faded sprite variants and fonts
- Render nodes layer by layer, children relative to their parents
"""

import os

import pygame

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.runtime.game_settings import Display, KittyConfig, BerryConfig
from strawberry_sprint.graphics.stage import NodeKind


PLACEHOLDER_COLORS = {
    "kitty": (255, 255, 255),
    "berry": (220, 30, 60),
    "background": (255, 214, 228),
}

PLACEHOLDER_SIZES = {
    "kitty": (KittyConfig.SPRITE_SIZE, KittyConfig.SPRITE_SIZE),
    "berry": (BerryConfig.SPRITE_SIZE, BerryConfig.SPRITE_SIZE),
}


class DrawManager:
    """Renders stage nodes with sprite, variant and font caches."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        self.images = {}
        self._variants = {}
        self._fonts = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path, size=None):
        """
        Load and cache an image, falling back to a drawn placeholder.

        Args:
            key: Sprite name referenced by nodes ("kitty", "berry", "background")
            path: File path to image
            size: Optional target size
        """
        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image at {path} ({e}), using placeholder", category="render")
            img = self._generate_placeholder(key, size)

        if size is not None and img.get_size() != tuple(size):
            img = pygame.transform.smoothscale(img, size)

        self.images[key] = img
        self._variants.clear()
        return img

    def load_scene_sprites(self, config, stage_size):
        """Load the three sprites named in a SceneConfig."""
        base = config.asset_dir
        self.load_image("background", os.path.join(base, config.background_image), stage_size)
        self.load_image("kitty", os.path.join(base, config.kitty_image), PLACEHOLDER_SIZES["kitty"])
        self.load_image("berry", os.path.join(base, config.berry_image), PLACEHOLDER_SIZES["berry"])

    def get_image(self, key):
        """Cached sprite, generating a placeholder for unknown keys."""
        img = self.images.get(key)
        if img is None:
            img = self._generate_placeholder(key)
            self.images[key] = img
        return img

    def _generate_placeholder(self, key, size=None):
        """Flat stand-in so a missing asset never stops the scene."""
        size = tuple(size) if size else PLACEHOLDER_SIZES.get(key, (32, 32))
        color = PLACEHOLDER_COLORS.get(key, (255, 0, 255))
        surface = pygame.Surface(size, pygame.SRCALPHA)

        if key == "background":
            surface.fill(color)
        else:
            radius = min(size) // 2
            pygame.draw.circle(surface, color, (size[0] // 2, size[1] // 2), radius)
            pygame.draw.circle(surface, (40, 40, 40), (size[0] // 2, size[1] // 2), radius, 3)
        return surface

    def _get_variant(self, key, scale, opacity):
        """Scaled and faded sprite, cached by rounded parameters."""
        scale = round(scale, 2)
        alpha = int(round(max(0.0, min(1.0, opacity)) * 255))
        cache_key = (key, scale, alpha)

        if cache_key in self._variants:
            return self._variants[cache_key]

        img = self.get_image(key)
        if scale != 1.0:
            w, h = img.get_size()
            img = pygame.transform.smoothscale(img, (max(1, int(w * scale)), max(1, int(h * scale))))
        if alpha < 255:
            img = img.copy()
            img.set_alpha(alpha)

        self._variants[cache_key] = img
        return img

    def get_font(self, size, bold=False):
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(None, int(size * 1.4), bold=bold)
        return self._fonts[key]

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, stage, target_surface):
        """Draw every mounted node of stage in layer order."""
        target_surface.fill(Display.BACKGROUND_COLOR)
        for node in stage.iter_nodes():
            self._draw_node(target_surface, node, 0.0, 0.0, 1.0, 1.0)

    def _draw_node(self, surface, node, parent_x, parent_y, parent_scale, parent_opacity):
        """Draw one node and recurse into its children."""
        x = parent_x + node.x * parent_scale
        y = parent_y + node.y * parent_scale
        scale = parent_scale * node.scale
        opacity = parent_opacity * node.opacity

        if opacity <= 0:
            return

        if node.kind is NodeKind.IMAGE:
            self._draw_image(surface, node, x, y, scale, opacity)
        elif node.kind is NodeKind.RECT:
            self._draw_rect(surface, node, x, y, scale, opacity)
        elif node.kind is NodeKind.TEXT:
            self._draw_text(surface, node, x, y, opacity)

        for child in node.children:
            self._draw_node(surface, child, x, y, scale, opacity)

    def _draw_image(self, surface, node, x, y, scale, opacity):
        img = self._get_variant(node.attrs.get("sprite", "missing"), scale, opacity)
        if node.attrs.get("anchor") == "topleft":
            rect = img.get_rect(topleft=(x, y))
        else:
            rect = img.get_rect(center=(x, y))
        surface.blit(img, rect)

    def _draw_rect(self, surface, node, x, y, scale, opacity):
        width = int(node.attrs.get("width", 0) * scale)
        height = int(node.attrs.get("height", 0) * scale)
        radius = int(node.attrs.get("radius", 0) * scale)

        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        local = panel.get_rect()
        fill = node.attrs.get("fill")
        stroke = node.attrs.get("stroke")
        if fill:
            pygame.draw.rect(panel, fill, local, 0, border_radius=radius)
        if stroke:
            pygame.draw.rect(panel, stroke, local, 1, border_radius=radius)
        if opacity < 1.0:
            panel.set_alpha(int(opacity * 255))
        surface.blit(panel, (x, y))

    def _draw_text(self, surface, node, x, y, opacity):
        font = self.get_font(node.attrs.get("size", 14), node.attrs.get("bold", False))
        color = node.attrs.get("fill", (17, 17, 17))
        text_surf = font.render(node.text, True, color[:3])

        alpha = color[3] if len(color) == 4 else 255
        alpha = int(alpha * opacity)
        if alpha < 255:
            text_surf.set_alpha(alpha)

        # y is the text baseline
        if node.attrs.get("anchor") == "end":
            rect = text_surf.get_rect(bottomright=(x, y))
        else:
            rect = text_surf.get_rect(bottomleft=(x, y))
        surface.blit(text_surf, rect)
