from strawberry_sprint.systems.collision.collision_manager import CollisionManager

__all__ = ['CollisionManager']
