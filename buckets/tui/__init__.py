from buckets.tui.renderers import BucketConsoleUI

__all__ = ["BucketConsoleUI"]
