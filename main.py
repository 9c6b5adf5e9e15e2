#!/usr/bin/env python3
import logging
import os

from region import Region
from bisection import midpoint, split

def main():
    logging.basicConfig(level=os.environ.get("REGION_LOG_LEVEL", "WARNING").upper())
    a = Region.open_segment(0, 1) | Region.closed_segment(1, 2)
    print(a)
    print(Region.closed_segment(0, 2) & Region.closed_segment(1, 3))
    print(~Region.closed_segment(0, 1))
    print(Region.closed_segment(0, 1) <= Region.open_segment(-1, 2))
    for i in Region.closed_segment(0, 1).to_closed_intervals():
        print(i)
    ray = Region.open_right_ray(1).segments[0]
    m = midpoint(ray)
    print(m)
    for s in split(Region.closed_right_ray(0).segments[0], at=m):
        print(s)

if __name__ == "__main__":
    main()
