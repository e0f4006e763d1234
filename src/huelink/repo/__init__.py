from huelink.repo.hue_repository import HueRepository

__all__ = ["HueRepository"]
