"""Output layout and Parquet schemas for simulation artifacts."""
