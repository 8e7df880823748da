from .icon import build_icon, build_icon_scene
from .models import DATA_PATH, DesignRegistry, IconDesign

__all__ = ["build_icon", "build_icon_scene", "DATA_PATH", "DesignRegistry", "IconDesign"]
