"""The demo scene: a few shapes on a platform under gravity."""

from __future__ import annotations

from littleengine.assets import AssetManager
from littleengine.camera import Camera
from littleengine.matrix import Mat4
from littleengine.physics import aabb_vs_aabb, simple_gravity, sphere_vs_aabb
from littleengine.vectors import Vec3

CAMERA_SPEED = 40.0


class World:
    """Scene state: shapes, camera, light and the matrices of the last update."""

    def __init__(self) -> None:
        self.pause = False
        self.camera: Camera | None = None
        self.assets: AssetManager | None = None
        self.light_dir = Vec3()
        self.view = Mat4()
        self.projection = Mat4()

    def load(self) -> None:
        """Build the scene's shapes and camera."""
        self.light_dir = Vec3(-0.2, -1.0, 0.3)
        assets = AssetManager()

        ball1 = assets.add_sphere("ball1", 60, 60, Vec3.splat(0.4))
        ball1.transform.scaling = Vec3.splat(6.0)
        ball1.transform.translation = Vec3(5.0, 16.0, 12.0)
        ball1.draw = True
        ball1.sub_divide = False
        ball1.lines = 20.0

        ball2 = assets.add_sphere("ball2", 60, 60, Vec3.splat(1.0))
        ball2.transform.scaling = Vec3.splat(10.0)
        ball2.transform.translation = Vec3(15.0, 16.0, 40.0)
        ball2.draw = True
        ball2.checkered = True
        ball2.divs = 20.0

        cube1 = assets.add_cube("cube1", Vec3(0.71, 1.0, 0.44))
        cube1.transform.scaling = Vec3.splat(4.0)
        cube1.transform.translation = Vec3(15.0, 16.0, 25.0)
        cube1.draw = True
        cube1.checkered = True
        cube1.divs = 2.0

        cube2 = assets.add_cube("cube2", Vec3(1.0, 0.58, 0.1))
        cube2.transform.scaling = Vec3.splat(7.0)
        cube2.transform.translation = Vec3(35.0, 16.0, 20.0)
        cube2.draw = True
        cube2.sub_divide = False
        cube2.lines = 0.0

        torus = assets.add_torus("torus", 40, Vec3(0.3, 0.88, 0.2))
        torus.transform.scaling = Vec3.splat(10.0)
        torus.transform.translation = Vec3(-25.0, 10.0, 30.0)
        torus.draw = True
        torus.sub_divide = False
        torus.lines = 0.0

        platform = assets.add_cube("platform", Vec3.splat(0.8))
        platform.transform.scaling = Vec3(700.0, 2.0, 700.0)
        platform.transform.translation = Vec3(0.0, -2.0, 0.0)
        platform.sub_divide = True
        platform.lines = 40.0

        assets.refresh_shape_list()
        self.assets = assets
        self.camera = Camera()

    def update(self, dt: float, aspect_ratio: float) -> None:
        """Advance physics by ``dt`` seconds unless paused, then refresh the camera matrices."""
        if self.assets is None or self.camera is None:
            raise RuntimeError("world is not loaded")
        assets = self.assets
        if not self.pause:
            platform = assets.get_shape("platform")
            for name in ("ball1", "ball2"):
                ball = assets.get_shape(name)
                sphere_vs_aabb(ball, platform)
                ball.velocity = simple_gravity(ball.velocity, dt)
            for name in ("cube1", "cube2"):
                cube = assets.get_shape(name)
                aabb_vs_aabb(cube, platform)
                cube.velocity = simple_gravity(cube.velocity, dt)
            for shape in assets.shapes.values():
                shape.transform.translation = shape.transform.translation + shape.velocity
        self.camera.velocity = CAMERA_SPEED * dt
        self.view = self.camera.view()
        self.projection = self.camera.projection(aspect_ratio)