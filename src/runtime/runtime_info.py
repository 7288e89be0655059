import shutil


class RuntimeInfo:

    @classmethod
    def has_executable(cls, name: str) -> bool:
        """True if name resolves on PATH (or is an executable path)"""
        return shutil.which(name) is not None
