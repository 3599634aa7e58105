"""Storage gateway.

Upload orchestration for a file-storage gateway: multipart parsing for the
legacy and multi-file upload protocols, per-bucket size policy, content type
resolution, webp transcoding with blurhash fingerprints, and two-phase
coordination between the metadata registry and the content store.
"""

from .__version__ import __version__

__all__ = ["__version__"]
