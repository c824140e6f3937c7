"""Core building blocks shared by the client and page layers."""
