import math

import pymunk


def static_circle(world, label, position, radius, material, style, collision_type=0):
    body = pymunk.Body(body_type=pymunk.Body.STATIC)
    body.position = position
    shape = pymunk.Circle(body, radius)
    shape.elasticity = material.restitution
    shape.friction = material.friction
    shape.collision_type = collision_type
    return world.entity(label, body, shape, style, material)


def static_rect(world, label, spec, material, style):
    body = pymunk.Body(body_type=pymunk.Body.STATIC)
    body.position = (spec.x, spec.y)
    body.angle = spec.angle
    shape = pymunk.Poly.create_box(body, (spec.width, spec.height))
    shape.elasticity = material.restitution
    shape.friction = material.friction
    return world.entity(label, body, shape, style, material)


def with_air_drag(air_drag):
    def velocity_func(body, gravity, damping, dt):
        # damping arrives already raised to dt, the drag is per second as well
        pymunk.Body.update_velocity(body, gravity, damping * (1.0 - air_drag) ** dt, dt)

    return velocity_func


def dynamic_circle(world, label, position, radius, material, style, collision_type=0):
    mass = material.density * math.pi * radius**2
    body = pymunk.Body(mass, pymunk.moment_for_circle(mass, 0, radius))
    body.position = position
    if material.air_drag:
        body.velocity_func = with_air_drag(material.air_drag)
    shape = pymunk.Circle(body, radius)
    shape.elasticity = material.restitution
    shape.friction = material.friction
    shape.collision_type = collision_type
    return world.entity(label, body, shape, style, material)
