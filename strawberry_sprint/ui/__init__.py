from strawberry_sprint.ui.hud import Hud

__all__ = ['Hud']
