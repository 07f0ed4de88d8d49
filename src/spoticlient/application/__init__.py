"""Application layer: the Client and its resource clients."""
