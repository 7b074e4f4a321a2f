"""ShipCost - 多承运商运费估算"""

__version__ = "0.1.0"
