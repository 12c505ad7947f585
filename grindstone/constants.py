"""Fixed endpoints and limits used by the updater."""

MC_VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
"""URL of the Minecraft version manifest."""

MC_LIBRARIES_BASE_URL = "https://libraries.minecraft.net"
"""Base URL for Minecraft libraries."""

JAVA_JRE_MANIFEST_URL = (
    "https://launchermeta.mojang.com/v1/products/java-runtime/"
    "2ec0cc96c44e5a76b9c8b7c39df7210883d12871/all.json"
)
"""URL of the manifest listing the Java runtimes."""

MC_ASSETS_BASE_URL = "https://resources.download.minecraft.net"
"""Base URL for Minecraft assets."""

MC_MS_STORE_IDENTIFIER = "Microsoft.4297127D64EC6_8wekyb3d8bbwe"
"""Package identifier of the Microsoft Store launcher (Windows only)."""

MAX_PARALLEL_DOWNLOAD = 50
"""Maximum number of files downloaded at the same time."""