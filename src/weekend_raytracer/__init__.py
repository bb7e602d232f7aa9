"""CPU path tracer for analytic sphere scenes.

This package renders images by Monte Carlo sampling of light paths, with
support for:
- Diffuse, metal and dielectric materials
- Thin-lens camera with depth of field
- Row-parallel rendering on a fixed process pool with per-row random streams
- PPM and PNG output

Subpackages:
    core: Vectors, rays, sampling, integrator, image buffer and renderer
    geometry: Sphere primitive and hit records
    materials: Material models and scatter dispatch
    scene: Scene container and demo scenes
    camera: Thin-lens camera
    preview: Image export
"""

__version__ = "0.1.0"
