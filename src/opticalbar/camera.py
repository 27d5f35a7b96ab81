"""Convert between world and image coordinates using an optical bar camera model."""
import copy
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

import numpy as np
import scipy.spatial.transform

from . import config, corrections, helpers, optimize
from .errors import PixelToRayError, PointToPixelError

Number = Union[int, float]
Array = Union[Sequence[Number], np.ndarray]
Vector = Union[Number, Array]
Rotation = scipy.spatial.transform.Rotation
RefractionCorrection = Callable[[np.ndarray, float, float, np.ndarray], np.ndarray]
AberrationCorrection = Callable[[np.ndarray, np.ndarray, float, np.ndarray], np.ndarray]

ATTRIBUTES = (
    "image_size",
    "center_loc_pixels",
    "pixel_size",
    "focal_length",
    "scan_angle_radians",
    "scan_rate_radians",
    "forward_tilt_radians",
    "initial_position",
    "initial_orientation",
    "speed",
    "mean_earth_radius",
    "mean_surface_elevation",
    "use_motion_compensation",
    "scan_left_to_right",
)


class OpticalBarCamera:
    """
    Optical bar (panoramic) camera model.

    An `OpticalBarCamera` converts between 2-D image coordinates and the 3-D rays
    and world coordinates they observe, for a camera whose lens sweeps across the
    image while the platform carrying it moves. Each image column is exposed at a
    different time, and therefore from a different position along the platform
    path. The platform moves at constant velocity and constant attitude for the
    duration of a scan.

    All numeric attributes are coerced to floats in :attr:`vector` during
    initialization or when individually set.

    Attributes:
        vector (numpy.ndarray): Vector of the numeric camera attributes (20, )
        image_size (numpy.ndarray): Image size in pixels (columns, rows)
        center_loc_pixels (numpy.ndarray): Image coordinates of the optical axis
            (u, v)
        pixel_size (float): Physical size of a pixel (length units)
        focal_length (float): Focal length (length units)
        scan_angle_radians (float): Angle swept by one complete scan
        scan_rate_radians (float): Angular rate of the scan (radians per second)
        forward_tilt_radians (float): Tilt of the camera about the platform x-axis
        initial_position (numpy.ndarray): Platform position at the start of the scan
            (x, y, z)
        initial_orientation (numpy.ndarray): Platform attitude at the start of the
            scan, as an axis-angle vector (x, y, z)
        speed (float): Platform speed along its forward (+y) axis
        mean_earth_radius (float): Radius of the spherical datum
        mean_surface_elevation (float): Mean ground height above the datum
        use_motion_compensation (float): Image motion compensation multiplier
            (0 to disable, 1 to enable)
        scan_left_to_right (bool): Whether the scan sweeps from the first to the
            last image column
        apply_atmospheric_refraction (bool): Whether :meth:`pixel_to_vector`
            corrects rays for atmospheric refraction
        apply_velocity_aberration (bool): Whether :meth:`pixel_to_vector`
            corrects rays for velocity aberration
        refraction (callable): Atmospheric refraction correction
            `(camera_center, earth_radius, surface_elevation, ray) -> ray`
        aberration (callable): Velocity aberration correction
            `(camera_center, velocity, earth_radius, ray) -> ray`
        original_vector (numpy.ndarray): Value of :attr:`vector` when first
            initialized

    Example:
        >>> cam = OpticalBarCamera(
        ...     image_size=(1000, 500), pixel_size=1e-5, focal_length=0.5,
        ...     scan_angle_radians=0.1, scan_rate_radians=0.05,
        ...     initial_position=(7e6, 0, 0), speed=7500
        ... )
        >>> cam.scan_time
        2.0
        >>> cam.center_loc_pixels
        array([500., 250.])
    """

    def __init__(
        self,
        image_size: Vector,
        pixel_size: Number,
        focal_length: Number,
        scan_angle_radians: Number,
        scan_rate_radians: Number,
        center_loc_pixels: Vector = None,
        forward_tilt_radians: Number = 0,
        initial_position: Vector = (0, 0, 0),
        initial_orientation: Vector = (0, 0, 0),
        speed: Number = 0,
        mean_earth_radius: Number = 6371000,
        mean_surface_elevation: Number = 0,
        use_motion_compensation: Number = 1,
        scan_left_to_right: bool = True,
        apply_atmospheric_refraction: bool = False,
        apply_velocity_aberration: bool = False,
        refraction: RefractionCorrection = corrections.apply_atmospheric_refraction,
        aberration: AberrationCorrection = corrections.apply_velocity_aberration,
    ) -> None:
        self.vector = np.zeros(20, dtype=float)
        self.image_size = image_size
        if center_loc_pixels is None:
            center_loc_pixels = self.image_size / 2
        self.center_loc_pixels = center_loc_pixels
        self.pixel_size = pixel_size
        self.focal_length = focal_length
        self.scan_angle_radians = scan_angle_radians
        self.scan_rate_radians = scan_rate_radians
        self.forward_tilt_radians = forward_tilt_radians
        self.initial_position = initial_position
        self.initial_orientation = initial_orientation
        self.speed = speed
        self.mean_earth_radius = mean_earth_radius
        self.mean_surface_elevation = mean_surface_elevation
        self.use_motion_compensation = use_motion_compensation
        self.scan_left_to_right = bool(scan_left_to_right)
        self.apply_atmospheric_refraction = bool(apply_atmospheric_refraction)
        self.apply_velocity_aberration = bool(apply_velocity_aberration)
        self.refraction = refraction
        self.aberration = aberration
        self._test()
        self.original_vector = self.vector.copy()

    # ---- Properties (dependent) ----

    @property
    def image_size(self) -> np.ndarray:
        """Image size in pixels (columns, rows)."""
        return self.vector[0:2]

    @image_size.setter
    def image_size(self, value: Vector) -> None:
        self.vector[0:2] = helpers.format_list(value, length=2)

    @property
    def center_loc_pixels(self) -> np.ndarray:
        """Image coordinates of the optical axis (u, v)."""
        return self.vector[2:4]

    @center_loc_pixels.setter
    def center_loc_pixels(self, value: Vector) -> None:
        self.vector[2:4] = helpers.format_list(value, length=2)

    @property
    def pixel_size(self) -> float:
        """Physical size of a pixel, equal in both dimensions."""
        return float(self.vector[4])

    @pixel_size.setter
    def pixel_size(self, value: Number) -> None:
        self.vector[4] = value

    @property
    def focal_length(self) -> float:
        """Focal length, in the same units as :attr:`pixel_size`."""
        return float(self.vector[5])

    @focal_length.setter
    def focal_length(self, value: Number) -> None:
        self.vector[5] = value

    @property
    def scan_angle_radians(self) -> float:
        """Angle swept by one complete scan."""
        return float(self.vector[6])

    @scan_angle_radians.setter
    def scan_angle_radians(self, value: Number) -> None:
        self.vector[6] = value

    @property
    def scan_rate_radians(self) -> float:
        """Angular rate of the scan (radians per second)."""
        return float(self.vector[7])

    @scan_rate_radians.setter
    def scan_rate_radians(self, value: Number) -> None:
        self.vector[7] = value

    @property
    def forward_tilt_radians(self) -> float:
        """Tilt of the camera about the platform x-axis."""
        return float(self.vector[8])

    @forward_tilt_radians.setter
    def forward_tilt_radians(self, value: Number) -> None:
        self.vector[8] = value

    @property
    def initial_position(self) -> np.ndarray:
        """Platform position at the start of the scan (x, y, z)."""
        return self.vector[9:12]

    @initial_position.setter
    def initial_position(self, value: Vector) -> None:
        self.vector[9:12] = helpers.format_list(value, length=3, default=0)

    @property
    def initial_orientation(self) -> np.ndarray:
        """Platform attitude at the start of the scan, as an axis-angle (x, y, z)."""
        return self.vector[12:15]

    @initial_orientation.setter
    def initial_orientation(self, value: Vector) -> None:
        self.vector[12:15] = helpers.format_list(value, length=3, default=0)

    @property
    def speed(self) -> float:
        """Platform speed along its forward axis."""
        return float(self.vector[15])

    @speed.setter
    def speed(self, value: Number) -> None:
        self.vector[15] = value

    @property
    def mean_earth_radius(self) -> float:
        """Radius of the spherical datum."""
        return float(self.vector[16])

    @mean_earth_radius.setter
    def mean_earth_radius(self, value: Number) -> None:
        self.vector[16] = value

    @property
    def mean_surface_elevation(self) -> float:
        """Mean ground height above the datum."""
        return float(self.vector[17])

    @mean_surface_elevation.setter
    def mean_surface_elevation(self, value: Number) -> None:
        self.vector[17] = value

    @property
    def use_motion_compensation(self) -> float:
        """Image motion compensation multiplier (0 to disable, 1 to enable)."""
        return float(self.vector[18])

    @use_motion_compensation.setter
    def use_motion_compensation(self, value: Number) -> None:
        self.vector[18] = float(value)

    @property
    def shape(self) -> Tuple[int, int]:
        """Image shape in pixels (rows, columns)."""
        return int(self.image_size[1]), int(self.image_size[0])

    @property
    def max_col(self) -> int:
        """Image coordinate of the last column."""
        return int(self.image_size[0]) - 1

    @property
    def scan_time(self) -> float:
        """Time required for one complete scan."""
        return self.scan_angle_radians / self.scan_rate_radians

    # ---- Methods (class) ----

    @classmethod
    def from_json(cls, path: str, **kwargs: Any) -> "OpticalBarCamera":
        """
        Read camera from JSON.

        See :meth:`to_json` for the reverse.

        Arguments:
            path: Path to JSON file.
            **kwargs: Additional arguments to :class:`OpticalBarCamera`.
                These override any read from **path**.
        """
        json_args = helpers.read_json(path)
        return cls(**{**json_args, **kwargs})

    # ---- Methods (public) ----

    def copy(self) -> "OpticalBarCamera":
        """
        Return a copy of this camera.

        The original state of the copy (to which :meth:`reset` reverts)
        will be the current state of this camera, not its original state.

        Example:
            >>> cam = OpticalBarCamera((10, 10), 1, 1, 1, 1, speed=1)
            >>> ccam = cam.copy()
            >>> cam.speed = 2
            >>> ccam.speed
            1.0
        """
        cam = copy.deepcopy(self)
        cam.original_vector = cam.vector.copy()
        return cam

    def reset(self) -> None:
        """
        Reset this camera to its original state.

        Example:
            >>> cam = OpticalBarCamera((10, 10), 1, 1, 1, 1, initial_position=(1, 2, 3))
            >>> cam.initial_position += 1
            >>> cam.reset()
            >>> cam.initial_position
            array([1., 2., 3.])
        """
        self.vector = self.original_vector.copy()

    def to_dict(self, attributes: Sequence[str] = ATTRIBUTES) -> Dict[str, Any]:
        """
        Return this camera as a dictionary.

        Arguments:
            attributes: Names of attributes to include.

        Returns:
            Attribute names and values.

        Example:
            >>> cam = OpticalBarCamera((8, 6), 1e-5, 0.5, 0.1, 0.05)
            >>> cam.to_dict(('image_size', 'focal_length', 'scan_left_to_right'))
            {'image_size': (8.0, 6.0), 'focal_length': 0.5, 'scan_left_to_right': True}
        """
        obj = {}
        for key in attributes:
            value = getattr(self, key)
            if isinstance(value, np.ndarray):
                value = tuple(value.tolist())
            obj[key] = value
        return obj

    def to_json(
        self, path: str = None, attributes: Sequence[str] = ATTRIBUTES, **kwargs: Any
    ) -> Optional[str]:
        """
        Write or return this camera as JSON.

        See :meth:`from_json` for the reverse.

        Arguments:
            path: Path of file to write to.
                If `None`, a JSON-formatted string is returned.
            attributes: Attributes to include.
            **kwargs: Additional arguments to :func:`helpers.write_json()`.

        Returns:
            Attribute names and values as a JSON-formatted string,
                or `None` if **path** is specified.
        """
        obj = self.to_dict(attributes=attributes)
        return helpers.write_json(obj, path=path, **kwargs)

    def describe(self) -> str:
        """
        Return a human-readable summary of the camera parameters.

        Intended for diagnostics only. See :mod:`opticalbar.io` for the file format.
        """
        rows = [
            ("Image size", self.image_size),
            ("Center loc (pixels)", self.center_loc_pixels),
            ("Pixel size (m)", self.pixel_size),
            ("Focal length (m)", self.focal_length),
            ("Scan angle (rad)", self.scan_angle_radians),
            ("Scan rate (rad/s)", self.scan_rate_radians),
            ("Scan left to right", self.scan_left_to_right),
            ("Forward tilt (rad)", self.forward_tilt_radians),
            ("Initial position", self.initial_position),
            ("Initial pose", self.initial_orientation),
            ("Speed", self.speed),
            ("Mean earth radius", self.mean_earth_radius),
            ("Mean surface elevation", self.mean_surface_elevation),
            ("Use motion comp", self.use_motion_compensation),
            ("Atmospheric refraction", self.apply_atmospheric_refraction),
            ("Velocity aberration", self.apply_velocity_aberration),
        ]
        width = max(len(label) for label, _ in rows) + 2
        lines = [" Optical Bar Model ".center(66, "-"), ""]
        for label, value in rows:
            if isinstance(value, np.ndarray):
                value = "(" + ", ".join(repr(x) for x in value.tolist()) + ")"
            lines.append(" " + (label + ":").ljust(width) + str(value))
        lines += ["", "-" * 66]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def inframe(self, uv: np.ndarray) -> np.ndarray:
        """
        Test whether image coordinates are in (or on) the image frame.

        Arguments:
            uv: Image coordinates (n, [u, v]).

        Returns:
            Boolean mask (n, ).

        Example:
            >>> cam = OpticalBarCamera((10, 12), 1, 1, 1, 1)
            >>> uv = np.array([(-1, 1), (0, 0), (9, 11), (10, 15)])
            >>> cam.inframe(uv).tolist()
            [False, True, True, False]
        """
        uv = np.atleast_2d(uv)
        # Ignore comparisons to NaN
        with np.errstate(invalid="ignore"):
            return np.all((uv >= 0) & (uv <= self.image_size), axis=1)

    # ---- Forward projection ----

    def pixel_to_sensor_plane(self, pixel: Array) -> np.ndarray:
        """
        Return the position of a pixel on the sensor plane.

        Arguments:
            pixel: Image coordinates (u, v).

        Returns:
            Offset from the optical axis in physical units (x, y).
        """
        return (self._as_pixel(pixel) - self.center_loc_pixels) * self.pixel_size

    def pixel_to_time_delta(self, pixel: Array) -> float:
        """
        Return the time at which a pixel was exposed, relative to the scan start.

        The lens sweeps across image columns at a constant rate,
        so time is proportional to the position of the column along the sweep.

        Arguments:
            pixel: Image coordinates (u, v).

        Example:
            >>> cam = OpticalBarCamera((11, 5), 1, 1, scan_angle_radians=1,
            ...     scan_rate_radians=0.5)
            >>> cam.pixel_to_time_delta((0, 0)), cam.pixel_to_time_delta((5, 0))
            (0.0, 1.0)
            >>> cam.scan_left_to_right = False
            >>> cam.pixel_to_time_delta((0, 0)), cam.pixel_to_time_delta((10, 0))
            (2.0, 0.0)
        """
        u = self._as_pixel(pixel)[0]
        max_col = self.max_col
        if self.scan_left_to_right:
            fraction = u / max_col
        else:
            fraction = (max_col - u) / max_col
        return float(fraction * self.scan_time)

    def camera_pose(self, pixel: Array = None) -> Rotation:
        """
        Return the platform attitude when a pixel was exposed.

        Attitude is constant for the duration of a scan.

        Arguments:
            pixel: Image coordinates (u, v). Ignored.

        Returns:
            Rotation from camera to world coordinates.
        """
        return Rotation.from_rotvec(self.initial_orientation)

    def velocity(self, pixel: Array = None) -> np.ndarray:
        """
        Return the platform velocity when a pixel was exposed.

        The platform moves along its forward (+y) axis, expressed in world
        coordinates by the camera pose and the forward tilt of the camera.

        Arguments:
            pixel: Image coordinates (u, v). If `None`, the scan start is used.

        Returns:
            Velocity in world coordinates (vx, vy, vz).
        """
        pose = self.camera_pose(pixel).as_matrix()
        # Platform attitude relative to the tilted camera
        m = helpers.rotation_x_axis(-self.forward_tilt_radians) @ pose
        return m @ np.array((0, self.speed, 0), dtype=float)

    def camera_center(self, pixel: Array = None) -> np.ndarray:
        """
        Return the platform position when a pixel was exposed.

        Arguments:
            pixel: Image coordinates (u, v). If `None`, the position at the
                start of the scan (:attr:`initial_position`) is returned.

        Returns:
            World coordinates (x, y, z).

        Example:
            >>> cam = OpticalBarCamera((11, 5), 1, 1, 1, 1, speed=2)
            >>> cam.camera_center().tolist()
            [0.0, 0.0, 0.0]
            >>> cam.camera_center((10, 0)).tolist()
            [0.0, 2.0, 0.0]
        """
        if pixel is None:
            return self.initial_position.copy()
        dt = self.pixel_to_time_delta(pixel)
        return self.initial_position + dt * self.velocity(pixel)

    def pixel_to_vector_uncorrected(self, pixel: Array) -> np.ndarray:
        """
        Project image coordinates to a ray direction, without physical corrections.

        Arguments:
            pixel: Image coordinates (u, v).

        Returns:
            Unit ray direction in world coordinates (x, y, z).

        Raises:
            ValueError: Motion compensation is enabled but the camera is not above
                the mean surface.
        """
        xy = self.pixel_to_sensor_plane(pixel)
        # Horizontal angle away from the optical axis
        alpha = xy[0] / self.focal_length
        # The film was translated under the lens to compensate for platform motion
        compensation = 0.0
        if self.use_motion_compensation:
            center = self.camera_center(pixel)
            height = np.linalg.norm(center) - (
                self.mean_surface_elevation + self.mean_earth_radius
            )
            if height <= 0:
                raise ValueError(
                    f"Camera is not above the mean surface (height: {height})"
                )
            compensation = (
                (self.focal_length * self.speed)
                / (height * self.scan_rate_radians)
                * np.sin(alpha)
                * self.use_motion_compensation
            )
            if not self.scan_left_to_right:
                compensation *= -1
        # East-south-down, as for linescan cameras
        ray = np.array(
            (
                self.focal_length * np.sin(alpha),
                xy[1] + compensation,
                self.focal_length * np.cos(alpha),
            )
        )
        return self.camera_pose(pixel).apply(helpers.unit_vector(ray))

    def pixel_to_vector(self, pixel: Array) -> np.ndarray:
        """
        Project image coordinates to a ray direction.

        Applies, in order, the atmospheric refraction correction
        (if :attr:`apply_atmospheric_refraction`) and the velocity aberration
        correction (if :attr:`apply_velocity_aberration`) to the result of
        :meth:`pixel_to_vector_uncorrected`.

        Arguments:
            pixel: Image coordinates (u, v).

        Returns:
            Unit ray direction in world coordinates (x, y, z),
                starting from :meth:`camera_center` of the same pixel.

        Raises:
            PixelToRayError: Projection or one of the corrections failed.
        """
        pixel = self._as_pixel(pixel)
        try:
            ray = self.pixel_to_vector_uncorrected(pixel)
            if self.apply_atmospheric_refraction or self.apply_velocity_aberration:
                center = self.camera_center(pixel)
            if self.apply_atmospheric_refraction:
                ray = self.refraction(
                    center, self.mean_earth_radius, self.mean_surface_elevation, ray
                )
            if self.apply_velocity_aberration:
                ray = self.aberration(
                    center, self.velocity(pixel), self.mean_earth_radius, ray
                )
        except Exception as e:
            raise PixelToRayError(
                f"Could not project pixel {tuple(pixel.tolist())} to a ray: {e}"
            ) from e
        return ray

    def invproject(self, uv: np.ndarray, depth: Vector = None) -> np.ndarray:
        """
        Project image coordinates to ray directions or world coordinates.

        Arguments:
            uv: Image coordinates (n, [u, v]).
            depth: Distance of points along each ray from its camera center,
                as either a scalar or a vector (n, ).
                If `None`, ray directions are returned.

        Returns:
            Ray directions or world coordinates (n, [x, y, z]).
        """
        uv = np.atleast_2d(uv)
        xyz = np.array([self.pixel_to_vector(pixel) for pixel in uv]).reshape(-1, 3)
        if depth is not None:
            centers = np.array([self.camera_center(pixel) for pixel in uv])
            xyz = centers.reshape(-1, 3) + xyz * np.reshape(depth, (-1, 1))
        return xyz

    # ---- Inverse projection ----

    def point_to_pixel(self, point: Array, start: Array = None) -> np.ndarray:
        """
        Project world coordinates into the image.

        Camera position and rays both depend on the pixel, so there is no
        closed-form solution. Instead, the pixel is found by minimizing the
        difference between its ray and the direction from its camera center to
        the point (see :func:`optimize.levenberg_marquardt`), with the tolerances
        and evaluation limit in :mod:`opticalbar.config`.

        Points close to the camera, relative to the distance it travels during
        the scan, may be seen by more than one pixel, since the camera center
        moves with the column. Which one is returned depends on **start**,
        which should then be close to the expected pixel.

        Arguments:
            point: World coordinates (x, y, z).
            start: Initial guess (u, v). Defaults to the image center.

        Returns:
            Image coordinates (u, v).

        Raises:
            PointToPixelError: Solver failed to converge on a pixel whose ray
                passes through the point.
        """
        point = np.asarray(point, dtype=float).reshape(-1)
        if point.size != 3:
            raise ValueError(f"Point must have 3 coordinates, not {point.size}")
        if start is None:
            start = self.image_size / 2

        def residuals(uv: np.ndarray) -> np.ndarray:
            ray = self.pixel_to_vector(uv)
            return ray - helpers.unit_vector(point - self.camera_center(uv))

        try:
            uv, status = optimize.levenberg_marquardt(
                residuals,
                x0=self._as_pixel(start),
                target=np.zeros(3),
                abs_tol=config.abs_tolerance,
                rel_tol=config.rel_tolerance,
                max_iterations=config.max_iterations,
            )
            error = np.linalg.norm(residuals(uv))
        except (PixelToRayError, ValueError) as e:
            raise PointToPixelError(
                f"Could not project point {tuple(point.tolist())} into the image: {e}"
            ) from e
        if status <= 0:
            raise PointToPixelError(
                f"Could not project point {tuple(point.tolist())} into the image"
                f" (solver status: {status})"
            )
        if error > config.max_residual:
            raise PointToPixelError(
                f"Could not project point {tuple(point.tolist())} into the image"
                f" (ray misses point by {error} radians)"
            )
        return uv

    def project(self, xyz: np.ndarray, start: Array = None) -> np.ndarray:
        """
        Project world coordinates into the image.

        Arguments:
            xyz: World coordinates (n, [x, y, z]).
            start: Initial guess (u, v) for every point.
                Defaults to the image center.

        Returns:
            Image coordinates (n, [u, v]).

        Raises:
            PointToPixelError: A point could not be projected.
        """
        xyz = np.atleast_2d(xyz)
        uv = [self.point_to_pixel(point, start=start) for point in xyz]
        return np.array(uv).reshape(-1, 2)

    # ---- Transformation ----

    def apply_transform(
        self, rotation: np.ndarray, translation: Array, scale: Number = 1
    ) -> None:
        """
        Apply a similarity transform to the platform position and attitude.

        Sensor and scan parameters are unchanged.

        Arguments:
            rotation: Rotation matrix (3, 3).
            translation: Translation (x, y, z).
            scale: Scale factor.

        Raises:
            ValueError: Rotation is not (3, 3) or scale is not positive.

        Example:
            >>> cam = OpticalBarCamera((10, 10), 1, 1, 1, 1, initial_position=(1, 0, 0))
            >>> rotation = np.array([(0, -1, 0), (1, 0, 0), (0, 0, 1)])
            >>> cam.apply_transform(rotation, (0, 0, 1), scale=2)
            >>> cam.initial_position
            array([0., 2., 1.])
        """
        rotation = np.asarray(rotation, dtype=float)
        if rotation.shape != (3, 3):
            raise ValueError(f"Rotation must be (3, 3), not {rotation.shape}")
        translation = np.asarray(translation, dtype=float).reshape(-1)
        if translation.size != 3:
            raise ValueError(f"Translation must have length 3, not {translation.size}")
        if not scale > 0:
            raise ValueError(f"Scale must be positive, not {scale}")
        position = self.camera_center()
        pose = self.camera_pose()
        self.initial_position = scale * (rotation @ position) + translation
        self.initial_orientation = (Rotation.from_matrix(rotation) * pose).as_rotvec()

    # ---- Methods (private) ----

    def _test(self) -> None:
        """
        Test for invalid camera parameters.

        Raises:
            ValueError: A camera parameter is invalid.
        """
        if np.any(self.image_size % 1 != 0) or np.any(self.image_size < 1):
            raise ValueError(
                f"Image size must be positive integers: {self.image_size.tolist()}"
            )
        if self.max_col < 1:
            raise ValueError("Image must have more than one column")
        if self.pixel_size <= 0:
            raise ValueError(f"Pixel size must be positive: {self.pixel_size}")
        if self.focal_length <= 0:
            raise ValueError(f"Focal length must be positive: {self.focal_length}")
        if self.scan_rate_radians == 0:
            raise ValueError("Scan rate cannot be zero")
        if not np.all(np.isfinite(self.vector)):
            raise ValueError("Camera parameters must be finite")

    @staticmethod
    def _as_pixel(pixel: Array) -> np.ndarray:
        """
        Coerce image coordinates to a float vector (2, ).

        Raises:
            ValueError: Image coordinates do not have length 2.
        """
        pixel = np.asarray(pixel, dtype=float).reshape(-1)
        if pixel.size != 2:
            raise ValueError(f"Pixel must have 2 coordinates, not {pixel.size}")
        return pixel
