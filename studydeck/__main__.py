# -*- coding: utf-8 -*-
"""
Запуск API: python -m studydeck
"""

import uvicorn

from studydeck.config.uvicorn_config import (get_uvicorn_config,
                                             setup_uvicorn_logging)

if __name__ == "__main__":
    setup_uvicorn_logging()
    uvicorn.run(**get_uvicorn_config())
