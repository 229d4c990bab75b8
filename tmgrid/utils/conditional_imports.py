"""
Intercepts import errors concerning optional imports to either:
    - Point the user at the tmgrid extra that provides the package or
    - Auto-download the specified package
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Union

from tmgrid.utils.mixins import LoggingMixin


class ConditionalPackageInterceptor(LoggingMixin):
    """
    Resolves missing optional packages. Only packages added to this object using
    the .permit_packages() method are handled; anything else falls through to the
    usual ModuleNotFoundError.

    tmgrid registers its optional packages in tmgrid/__init__.py:

        ConditionalPackageInterceptor.permit_packages({
            'geographiclib': 'tmgrid[geodesic]',
            'httpx': 'tmgrid[registry]',
        })
        sys.meta_path.append(ConditionalPackageInterceptor)

    The core projection math never imports an optional package; only the karney
    distance algorithm and the Lantmateriet registry client do, and both import
    lazily inside the function that needs them.
    """

    PERMITTED_PACKAGES: dict = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Adds python packages to the list of packages that are permitted to be
        automatically installed.

        You can add to this list in two ways:
            As a list: packages will be pip installed exactly as listed
                ["httpx"]
                "import httpx" -> pip install httpx

            As a dict: packages will be pip installed by the corresponding value
                {"httpx": "tmgrid[registry]"}
                "import httpx" -> pip install tmgrid[registry]

        Args:
            packages (Union[list, dict]): The packages that will be allowed to
                auto-install if missing

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether packages may be auto-downloaded or not. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        DO NOT USE.

        Called by importlib after every other finder on sys.meta_path has failed
        to locate `name`, i.e. the package is not installed.

        Args:
            name (str): The name of the package
            path:
            target:

        Returns:
            A module spec if the package was installed, otherwise None
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        if cls.AUTO_DOWNLOAD:
            print(f"Module {name!r} not installed. Attempting to pip install...")
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', cls.PERMITTED_PACKAGES[name]],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"You are attempting to use a module which requires an optional installation ({name}). "
            "Please choose one of the following options to continue: \n\n "
            "1) Enable package auto-installation using: \n"
            "    from tmgrid.utils.conditional_imports import ConditionalPackageInterceptor \n"
            "    ConditionalPackageInterceptor.permit_auto_download(True) \n\n"
            "2) Pip install the package yourself using the following command: \n"
            f"    pip install {cls.PERMITTED_PACKAGES[name]}"
        )
