"""Application metadata records for peer-to-peer session negotiation."""
