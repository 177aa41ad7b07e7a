"""Book catalog statistics: normalization, aggregation and small regression models."""
