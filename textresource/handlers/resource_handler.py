"""Resource reading handler - caller-side policies on top of the loader"""

from typing import Optional

from textresource.config.messages import FailureMessages
from textresource.config.settings import Settings
from textresource.services.loader_service import ResourceTextLoader
from textresource.utils.result import Result


class ResourceHandler:
    """Handler deciding what to do when a resource cannot be loaded"""

    def __init__(self, loader: Optional[ResourceTextLoader] = None):
        """
        Initialize handler with required services

        Args:
            loader: Loader to use (default: ResourceTextLoader with settings encoding)
        """
        Settings.validate()
        self.loader = loader or ResourceTextLoader()

    def load(self, name=None, create_missing: Optional[bool] = None) -> Result[str]:
        """
        Load a resource with the chosen recovery policy

        Args:
            name: Resource name (default: from settings)
            create_missing: Create the resource if absent (default: from settings)

        Returns:
            Result from the loader
        """
        name = name or Settings.DEFAULT_RESOURCE
        if create_missing is None:
            create_missing = Settings.CREATE_MISSING

        if create_missing:
            return self.loader.load_or_create(name)
        return self.loader.load_strict(name)

    def read_resource(self, name=None, create_missing: Optional[bool] = None) -> Optional[str]:
        """
        Read a resource and report the outcome to the user

        Args:
            name: Resource name (default: from settings)
            create_missing: Create the resource if absent (default: from settings)

        Returns:
            Resource content, or None if error
        """
        result = self.load(name, create_missing)
        if result.is_err():
            print(FailureMessages.headline(result.error))
            print(FailureMessages.hint(result.error))
            return None

        content = result.value
        print(f"📄 Read {name or Settings.DEFAULT_RESOURCE} ({len(content)} characters)")
        return content

    def require_resource(self, name=None, create_missing: bool = True) -> str:
        """
        Read a resource, aborting on any failure

        Args:
            name: Resource name (default: from settings)
            create_missing: Create the resource if absent

        Returns:
            Resource content

        Raises:
            ResourceLoadError: If the resource could not be loaded
        """
        return self.load(name, create_missing).unwrap()

    @staticmethod
    def describe(result: Result) -> str:
        """Debug form of a load result"""
        if result.is_ok():
            return f"Ok({result.value!r})"
        reason = result.error
        return f"Err({reason.kind.name}, name={reason.name!r}, detail={reason.detail!r})"
