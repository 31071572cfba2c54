from pathlib import Path


class BucketAppError(Exception):
    """Base user-facing application error."""


class BucketFileError(BucketAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class DuplicateRuleError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Rule already exists")


class MalformedRecordError(BucketFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Malformed rule record ({detail})")


class DirectoryUnavailableError(BucketFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Rules directory unavailable ({detail})")


class InvalidBucketConfigError(BucketFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid bucket config ({detail})")


class BucketExistsError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Bucket already exists")


class BucketNotFoundError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Bucket doesn't exist")


class NotABucketError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Directory isn't a bucket, missing .b directory")


class RepositoryExistsError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Directory already exists")


class NotARepositoryError(BucketFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Not a repository")


class InvalidRuleError(BucketFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid rule ({detail})")
