"""Core document model shared by pagination, editing and output."""
