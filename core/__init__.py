"""Config merge core: regex literals, rule merging, document I/O and the run pipeline."""
