"""Точка входа в приложение."""
from pathlib import Path
from typing import Optional

from b64image.app import InsertBase64ImageApp
from b64image.config.settings import configure_logging


def main(settings_dir: Optional[Path] = None, verbose: bool = False) -> None:
    """Создаёт и запускает главное окно приложения."""
    configure_logging(verbose)
    app = InsertBase64ImageApp(settings_dir=settings_dir)
    app.mainloop()


if __name__ == "__main__":
    main()
