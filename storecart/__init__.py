"""storecart: product pricing and cart aggregation over a remote catalog."""
