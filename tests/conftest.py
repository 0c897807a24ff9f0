"""Shared pytest fixtures for themeport tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SHADCN_V3_CSS = """\
@tailwind base;
@tailwind components;

@layer base {
  :root {
    --background: 0 0% 100%;
    --foreground: 240 10% 3.9%;
    --primary: 240 5.9% 10%;
    --primary-foreground: 0 0% 98%;
    --destructive: 0 84.2% 60.2%;
    --radius: 0.5rem;
  }

  .dark {
    --background: 240 10% 3.9%;
    --foreground: 0 0% 98%;
    --primary: 0 0% 98%;
    --primary-foreground: 240 5.9% 10%;
  }
}
"""

TAILWIND_V4_CSS = """\
@import "tailwindcss";

:root {
  --background: oklch(1 0 0);
  --foreground: oklch(0.145 0 0);
  --primary: oklch(0.205 0 0);
  --ring: oklch(0.708 0 0);
  --sidebar: oklch(0.985 0 0);
}

.dark {
  --background: oklch(0.145 0 0);
  --foreground: oklch(0.985 0 0);
  --border: oklch(1 0 0 / 10%);
}

@theme inline {
  --color-background: var(--background);
}
"""

HEX_CSS = """\
/* Hand-written theme */
:root {
  --bg: #ffffff;
  --fg: #111;
  --color-primary: #3b82f6;
  --shadow-focus: 0 0 0 3px rgba(59, 130, 246, 0.5);
}
.dark {
  --bg: #0a0a0a;
  --fg: #fafafa;
}
"""


@pytest.fixture
def shadcn_css() -> str:
    """shadcn/ui export with Tailwind v3 bare HSL triplets inside @layer base."""
    return SHADCN_V3_CSS


@pytest.fixture
def tailwind_v4_css() -> str:
    """Tailwind v4 theme with oklch() values."""
    return TAILWIND_V4_CSS


@pytest.fixture
def hex_css() -> str:
    """Hand-written hex theme using short alias names."""
    return HEX_CSS


@pytest.fixture
def css_file(tmp_path: Path, tailwind_v4_css: str) -> Path:
    """Write the Tailwind v4 theme to a temporary file."""
    path = tmp_path / "theme.css"
    path.write_text(tailwind_v4_css)
    return path


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Return a path for a themes file that does not exist yet."""
    return tmp_path / "themes.yaml"
