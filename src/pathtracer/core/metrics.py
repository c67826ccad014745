# core/metrics.py

class Metrics:
    """
    Counters collected over one render pass.
    """
    def __init__(self, rays_traced_total: int = 0, time_spent: float = 0.0):
        self.rays_traced_total = rays_traced_total  # camera rays, not bounces
        self.time_spent = time_spent                 # wall clock, seconds

    def ns_per_ray(self) -> int:
        if self.rays_traced_total == 0:
            return 0
        return int(self.time_spent * 1e9) // self.rays_traced_total

    def describe(self) -> str:
        return (f"{self.ns_per_ray()} ns per ray, "
                f"{self.rays_traced_total} rays, "
                f"{self.time_spent:.3f} seconds")

    def __repr__(self) -> str:
        return (f"Metrics(rays_traced_total={self.rays_traced_total}, "
                f"time_spent={self.time_spent})")
