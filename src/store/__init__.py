"""Storage and materialization layer.

This package writes imported records as documents into the vault,
persists plugin settings, and exposes the SDK client.
"""
