"""
============================

Ad Exchange Adapters.

============================

This package contains adapter implementations for individual ad exchanges.
Adapters translate the generic auction request into each exchange's wire
format and the exchange's response back into normalized bids, implementing
the Bidder protocol defined in the protocols package.

"""
