from abc import abstractmethod
from overrides import overrides, EnforceOverrides


class DevsignalError(Exception, EnforceOverrides):
    """Raised only for broken contracts the host environment guarantees. Expected
    absence of an identifier is never an error."""

    def message(self) -> str:
        return ", ".join(str(arg) for arg in self.args)

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        """Return the error name"""
        pass


class InvalidArgumentError(DevsignalError, ValueError):
    @classmethod
    @overrides
    def name(cls) -> str:
        return "InvalidArgument"


class HashAlgorithmUnavailableError(DevsignalError):
    @classmethod
    @overrides
    def name(cls) -> str:
        return "HashAlgorithmUnavailable"


class AppPackageMissingError(DevsignalError):
    @classmethod
    @overrides
    def name(cls) -> str:
        return "AppPackageMissing"

    @overrides
    def message(self) -> str:
        return f"Own application package is not installed: {super().message()}"


class PlatformContractError(DevsignalError):
    @classmethod
    @overrides
    def name(cls) -> str:
        return "PlatformContract"


class PackageNotFoundError(LookupError):
    """Raised by Platform implementations when a package name is not installed."""

    pass
