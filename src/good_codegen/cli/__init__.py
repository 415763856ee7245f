from good_codegen.cli.main import app

__all__ = ["app"]
