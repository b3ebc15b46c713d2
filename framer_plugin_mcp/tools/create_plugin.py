"""Scaffold a new Framer plugin project on disk."""

import json
import logging
from typing import Any, Dict

import anyio

from framer_plugin_mcp.schemas import CreatePluginRequest
from framer_plugin_mcp.tools.templates import (
    PLAIN_DEFAULT_TEXT,
    PLAIN_INDEX,
    VITE_CONFIG,
    WALLET_DEFAULT_TEXT,
    WALLET_INDEX,
)

logger = logging.getLogger(__name__)

BASE_DEPENDENCIES = {
    "@framer/framer.motion": "^10.0.0",
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
}

WALLET_DEPENDENCIES = {
    "@web3-react/core": "^8.2.0",
    "@web3-react/injected-connector": "^6.0.7",
    "ethers": "^6.7.0",
}

DEV_DEPENDENCIES = {
    "@types/react": "^18.2.0",
    "typescript": "^5.0.0",
    "vite": "^4.0.0",
    "@vitejs/plugin-react": "^4.0.0",
}

TS_CONFIG = {
    "compilerOptions": {
        "target": "ES2020",
        "lib": ["DOM", "DOM.Iterable", "ESNext"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
    "references": [{"path": "./tsconfig.node.json"}],
}

TS_NODE_CONFIG = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
    },
    "include": ["vite.config.ts"],
}


def component_name(plugin_name: str) -> str:
    """Identifier used for the exported component."""
    return plugin_name.replace("-", "_")


def build_package_json(request: CreatePluginRequest) -> Dict[str, Any]:
    dependencies = dict(BASE_DEPENDENCIES)
    if request.wallet_connect:
        dependencies.update(WALLET_DEPENDENCIES)

    return {
        "name": request.name,
        "version": "1.0.0",
        "description": request.description,
        "main": "dist/index.js",
        "scripts": {
            "build": "vite build",
            "dev": "vite",
        },
        "dependencies": dependencies,
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


def render_vite_config(request: CreatePluginRequest) -> str:
    return VITE_CONFIG.substitute(plugin_name=request.name)


def render_index(request: CreatePluginRequest) -> str:
    """Render ``src/index.tsx``, picking the wallet variant when requested."""
    if request.wallet_connect:
        template, default_text = WALLET_INDEX, WALLET_DEFAULT_TEXT
    else:
        template, default_text = PLAIN_INDEX, PLAIN_DEFAULT_TEXT
    return template.substitute(
        component_name=component_name(request.name),
        default_text=default_text,
    )


def dump_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


async def create_plugin(request: CreatePluginRequest) -> str:
    """
    Write a Framer plugin project to ``request.output_path``.

    The directory (and its parents) is created when missing. Existing files
    with the same names are overwritten; nothing is rolled back if a write
    fails part way.

    Args:
        request: Validated create_plugin arguments

    Returns:
        Confirmation message with the absolute project path
    """
    plugin_dir = await anyio.Path(request.output_path).resolve()
    await plugin_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Creating plugin %r in %s", request.name, plugin_dir)

    await (plugin_dir / "package.json").write_text(dump_json(build_package_json(request)), encoding="utf-8")
    await (plugin_dir / "tsconfig.json").write_text(dump_json(TS_CONFIG), encoding="utf-8")
    await (plugin_dir / "tsconfig.node.json").write_text(dump_json(TS_NODE_CONFIG), encoding="utf-8")
    await (plugin_dir / "vite.config.ts").write_text(render_vite_config(request), encoding="utf-8")

    src_dir = plugin_dir / "src"
    await src_dir.mkdir(exist_ok=True)
    await (src_dir / "index.tsx").write_text(render_index(request), encoding="utf-8")

    return f"Successfully created Framer plugin project at {plugin_dir}"
