# scenes.py
"""
Catalog of named demo scenes.

Each builder takes a random source and the image aspect ratio and returns a
``Scene`` whose world is a HittableList holding a single BVH over the
scene's objects.
"""
import logging
from typing import Callable, Dict, List
from pathtracer import config
from pathtracer.camera.camera import Camera
from pathtracer.core.random import RandomSource
from pathtracer.core.vector import Color, Vector3
from pathtracer.errors import SceneNotFoundError
from pathtracer.geometry import (
    Box,
    BVHNode,
    ConstantMedium,
    Hittable,
    HittableList,
    MovingSphere,
    RotateY,
    Sphere,
    Translate,
    XYRect,
    XZRect,
    YZRect,
)
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Isotropic,
    Lambertian,
    Metal,
    NoiseTexture,
)
from pathtracer.materials.texture_loader import load_texture

logger = logging.getLogger(__name__)

BLACK = Color(0.0, 0.0, 0.0)
VUP = Vector3(0.0, 1.0, 0.0)


class Scene:
    """A world to render, the camera looking at it and the background radiance."""
    def __init__(self, world: Hittable, camera: Camera, background: Color = BLACK, name: str = ""):
        self.world = world
        self.camera = camera
        self.background = background
        self.name = name

    def __repr__(self) -> str:
        return f"Scene({self.name!r})"


def _indexed(objects: List[Hittable], time0: float = 0.0, time1: float = 1.0) -> HittableList:
    return HittableList([BVHNode(objects, time0=time0, time1=time1)])


def _default_camera(aspect_ratio: float, lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                    vfov: float = 20.0) -> Camera:
    return Camera(lookfrom, lookat, VUP, vfov, aspect_ratio, aperture=0.1, time0=0.0, time1=1.0)


def random_spheres(rng: RandomSource, aspect_ratio: float) -> Scene:
    objects: List[Hittable] = []
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    objects.append(Sphere(Vector3(0, -1000, 0), 1000, DiffuseLight(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse, bouncing upwards during the exposure
                albedo = rng.random_vector() * rng.random_vector()
                center2 = center + Vector3(0, rng.random(0.0, 0.5), 0)
                objects.append(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = rng.random_vector(0.5, 1.0)
                fuzz = rng.random(0.0, 0.5)
                objects.append(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                objects.append(Sphere(center, 0.2, Dielectric(1.5)))

    objects.append(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return Scene(_indexed(objects), _default_camera(aspect_ratio, vfov=10.0), BLACK, "random_spheres")


def two_spheres(rng: RandomSource, aspect_ratio: float) -> Scene:
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    objects: List[Hittable] = [
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, DiffuseLight(checker)),
    ]
    return Scene(_indexed(objects), _default_camera(aspect_ratio), BLACK, "two_spheres")


def two_perlin_spheres(rng: RandomSource, aspect_ratio: float) -> Scene:
    pertext = NoiseTexture(rng, 4.0)
    objects: List[Hittable] = [
        Sphere(Vector3(0, -1000, 0), 1000, DiffuseLight(pertext)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(pertext)),
    ]
    return Scene(_indexed(objects), _default_camera(aspect_ratio), BLACK, "two_perlin_spheres")


def earth(rng: RandomSource, aspect_ratio: float) -> Scene:
    earth_texture = load_texture(config.EARTH_TEXTURE)
    objects: List[Hittable] = [Sphere(Vector3(0, 0, 0), 2, DiffuseLight(earth_texture))]
    return Scene(_indexed(objects), _default_camera(aspect_ratio), BLACK, "earth")


def simple_light(rng: RandomSource, aspect_ratio: float) -> Scene:
    pertext = NoiseTexture(rng, 4.0)
    objects: List[Hittable] = [
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(pertext)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(pertext)),
        XYRect(3, 5, 1, 3, -2, DiffuseLight(Color(4, 4, 4))),
    ]
    camera = _default_camera(aspect_ratio, lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0))
    return Scene(_indexed(objects), camera, BLACK, "simple_light")


def _cornell_walls(light: DiffuseLight, light_rect) -> List[Hittable]:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    x0, x1, z0, z1 = light_rect
    return [
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(x0, x1, z0, z1, 554, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ]


def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), VUP, 40.0, aspect_ratio,
                  aperture=0.1, time0=0.0, time1=1.0)


def _cornell_blocks(make_medium) -> List[Hittable]:
    white = Lambertian(Color(0.73, 0.73, 0.73))

    box1: Hittable = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    box1 = RotateY(box1, 15)
    box1 = Translate(box1, Vector3(265, 0, 295))

    box2: Hittable = Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    box2 = RotateY(box2, -18)
    box2 = Translate(box2, Vector3(130, 0, 65))

    return [make_medium(box1, Color(0, 0, 0)), make_medium(box2, Color(1, 1, 1))]


def cornell_box(rng: RandomSource, aspect_ratio: float) -> Scene:
    objects = _cornell_walls(DiffuseLight(Color(15, 15, 15)), (213, 343, 227, 332))
    objects += _cornell_blocks(lambda boundary, color: ConstantMedium(boundary, 0.01, Lambertian(color)))
    return Scene(_indexed(objects), _cornell_camera(aspect_ratio), BLACK, "cornell_box")


def cornell_smoke(rng: RandomSource, aspect_ratio: float) -> Scene:
    objects = _cornell_walls(DiffuseLight(Color(7, 7, 7)), (113, 443, 127, 432))
    objects += _cornell_blocks(lambda boundary, color: ConstantMedium(boundary, 0.01, Isotropic(color)))
    return Scene(_indexed(objects), _cornell_camera(aspect_ratio), BLACK, "cornell_smoke")


def final_scene(rng: RandomSource, aspect_ratio: float) -> Scene:
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes1: List[Hittable] = []
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.random(1.0, 101.0)
            boxes1.append(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    objects: List[Hittable] = [BVHNode(boxes1, time0=0.0, time1=1.0)]
    objects.append(XZRect(123, 423, 147, 412, 554, DiffuseLight(Color(7, 7, 7))))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.append(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    objects.append(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    objects.append(Sphere(Vector3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    # The same glass sphere is both a visible surface and the boundary of the fog inside it.
    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    objects.append(boundary)
    objects.append(ConstantMedium(boundary, 0.2, Isotropic(Color(0.2, 0.4, 0.9))))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    objects.append(ConstantMedium(mist, 0.0001, Isotropic(Color(1, 1, 1))))

    objects.append(Sphere(Vector3(400, 200, 400), 100, Lambertian(ImageTexture(str(config.EARTH_TEXTURE)))))
    objects.append(Sphere(Vector3(220, 280, 300), 80, Lambertian(NoiseTexture(rng, 0.1))))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    boxes2: List[Hittable] = [Sphere(rng.random_vector(0.0, 165.0), 10, white) for _ in range(1000)]
    objects.append(Translate(RotateY(BVHNode(boxes2, time0=0.0, time1=1.0), 15), Vector3(-100, 270, 395)))

    camera = Camera(Vector3(478, 278, -600), Vector3(278, 278, 0), VUP, 40.0, aspect_ratio,
                    aperture=0.1, time0=0.0, time1=1.0)
    return Scene(_indexed(objects), camera, BLACK, "final_scene")


SCENES: Dict[str, Callable[[RandomSource, float], Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def build_scene(name: str, rng: RandomSource, aspect_ratio: float = config.ASPECT_RATIO) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise SceneNotFoundError(f"Unknown scene {name!r}; choose one of {', '.join(SCENES)}") from None
    scene = builder(rng, aspect_ratio)
    logger.info("Built scene %s", name)
    return scene
