"""Multi-user file vault storing files run-length compressed and XOR-scrambled."""

__version__ = "0.1.0"