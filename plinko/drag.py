import logging

import pymunk

from plinko.colors import ball_at
from plinko.config import DRAG_ERROR_BIAS, DRAG_MAX_FORCE

logger = logging.getLogger(__name__)


class BallDragger:
    """Grab a ball with the mouse and pull it around on a soft pivot joint.

    The mouse is a kinematic body that never joins the space; the joint
    lives in the world, so clearing the world also lets go of the ball.
    """

    def __init__(self, max_force=DRAG_MAX_FORCE, error_bias=DRAG_ERROR_BIAS):
        self.mouse_body = pymunk.Body(body_type=pymunk.Body.KINEMATIC)
        self.max_force = max_force
        self.error_bias = error_bias
        self.joint = None
        self.held = None

    def grab(self, world, point):
        self.release(world)
        ball = ball_at(world, point)
        if ball is None:
            return None
        self.mouse_body.position = point
        joint = pymunk.PivotJoint(self.mouse_body, ball.body, (0, 0), ball.body.world_to_local(point))
        joint.max_force = self.max_force
        joint.error_bias = self.error_bias
        self.joint = world.add_constraint(joint)
        self.held = ball
        logger.debug("Grabbed ball %d.", ball.id)
        return ball

    def move(self, point):
        self.mouse_body.position = point

    def release(self, world):
        if self.joint is None:
            return False
        world.remove_constraint(self.joint)
        self.joint = None
        self.held = None
        return True
