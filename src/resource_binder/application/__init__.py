"""Application layer - conversion, normalization and the resource state reader."""
