"""
Configuration management for the gesture pointer system.
"""
import math
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .errors import ConfigError
from .geometry import ActiveRegion
from .smoothing import check_smoothing_factor

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int
    mirror: bool


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class PointerConfig:
    """Gesture-to-pointer settings."""
    frame_reduction_margin: float
    smoothing_factor: int
    pinch_threshold_px: float
    smoothing_min: int = 1
    smoothing_max: int = 20


@dataclass
class ScreenConfig:
    """Size of the screen the active region maps onto."""
    width: int
    height: int


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_active_region: bool
    window_name: str


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    pointer: PointerConfig
    screen: ScreenConfig
    display: DisplayConfig
    logging: LoggingConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings

    Raises:
        FileNotFoundError: if the config file does not exist
        ConfigError: if a section is missing or a value is unusable
    """
    if path is None:
        # Default config ships inside the package
        path = DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    cfg = _dict_to_config(data)
    validate_config(cfg)
    return cfg


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    try:
        camera_data = data['camera']
        camera = CameraConfig(
            index=camera_data['index'],
            width=camera_data['width'],
            height=camera_data['height'],
            fps=camera_data['fps'],
            mirror=camera_data.get('mirror', True)
        )

        mp_data = data['mediapipe']
        mediapipe = MediaPipeConfig(
            max_num_hands=mp_data['max_num_hands'],
            model_complexity=mp_data.get('model_complexity', 1),
            min_detection_confidence=mp_data['min_detection_confidence'],
            min_tracking_confidence=mp_data['min_tracking_confidence']
        )

        pointer_data = data['pointer']
        pointer = PointerConfig(
            frame_reduction_margin=pointer_data['frame_reduction_margin'],
            smoothing_factor=pointer_data['smoothing_factor'],
            pinch_threshold_px=pointer_data['pinch_threshold_px'],
            smoothing_min=pointer_data.get('smoothing_min', 1),
            smoothing_max=pointer_data.get('smoothing_max', 20)
        )

        screen_data = data['screen']
        screen = ScreenConfig(
            width=screen_data['width'],
            height=screen_data['height']
        )

        display_data = data['display']
        display = DisplayConfig(
            show_landmarks=display_data['show_landmarks'],
            show_active_region=display_data['show_active_region'],
            window_name=display_data['window_name']
        )

        logging_data = data.get('logging') or {}
        logging_cfg = LoggingConfig(level=logging_data.get('level', 'INFO'))
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Invalid or incomplete configuration: missing {e}") from e

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        pointer=pointer,
        screen=screen,
        display=display,
        logging=logging_cfg
    )


def validate_pointer_config(pointer: PointerConfig) -> None:
    """
    Check the pointer settings that do not depend on frame or screen size.

    Raises:
        ConfigError: if a value cannot drive the pointer
    """
    check_smoothing_factor(pointer.smoothing_factor)
    check_smoothing_factor(pointer.smoothing_min)
    if pointer.smoothing_max < pointer.smoothing_min:
        raise ConfigError(
            f"smoothing_max ({pointer.smoothing_max}) is below smoothing_min ({pointer.smoothing_min})"
        )
    if not pointer.smoothing_min <= pointer.smoothing_factor <= pointer.smoothing_max:
        raise ConfigError(
            f"smoothing_factor ({pointer.smoothing_factor}) is outside "
            f"[{pointer.smoothing_min}, {pointer.smoothing_max}]"
        )
    threshold = pointer.pinch_threshold_px
    if not (isinstance(threshold, (int, float)) and math.isfinite(threshold) and threshold > 0):
        raise ConfigError(f"pinch_threshold_px must be a positive number, got {threshold!r}")
    margin = pointer.frame_reduction_margin
    if not (isinstance(margin, (int, float)) and math.isfinite(margin) and margin >= 0):
        raise ConfigError(f"frame_reduction_margin must be a non-negative number, got {margin!r}")


def validate_screen(width: float, height: float) -> None:
    """Raise ConfigError unless the screen has a positive size."""
    if not (width > 0 and height > 0):
        raise ConfigError(f"Screen size must be positive, got {width}x{height}")


def validate_config(cfg: Cfg) -> None:
    """
    Fail fast on configuration that would make the pointer unusable.

    Raises:
        ConfigError: on the first unusable value
    """
    validate_pointer_config(cfg.pointer)
    validate_screen(cfg.screen.width, cfg.screen.height)
    # The camera may deliver another size at runtime; it is checked again then.
    ActiveRegion.from_frame(cfg.camera.width, cfg.camera.height,
                            cfg.pointer.frame_reduction_margin)
