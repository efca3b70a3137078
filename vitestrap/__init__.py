"""vitestrap -- interactive Vite + React + Tailwind CSS project bootstrapper."""

__version__ = "0.1.0"
