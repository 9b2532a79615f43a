"""HTTP service exposing create/read operations over users."""
