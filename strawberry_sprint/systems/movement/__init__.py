from strawberry_sprint.systems.movement.steering import SteeringController, clamp

__all__ = ['SteeringController', 'clamp']
