"""Metric counter conversions and counter group records."""