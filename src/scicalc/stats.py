'''
Descriptive statistics over a list of numbers.
'''

from collections import namedtuple
import math
import statistics


StatisticsResult = namedtuple('StatisticsResult', [
    'count',
    'min',
    'max',
    'sum',
    'mean',
    'median',
    # Population, divided by n
    'variance',
    'std_dev',
    # Sample, divided by n - 1
    'sample_variance',
    'sample_std_dev',
])


def compute_statistics(values):
    '''
    Return StatisticsResult for values, or None if there are none.

    The sample variance of a single value is 0 rather than undefined.
    '''
    values = [float(value) for value in values]
    if not values:
        return None
    ordered = sorted(values)
    mean = statistics.fmean(values)
    variance = statistics.pvariance(values, mu=mean)
    if len(values) > 1:
        sample_variance = statistics.variance(values, xbar=mean)
    else:
        sample_variance = 0.0
    return StatisticsResult(count=len(values),
                            min=ordered[0],
                            max=ordered[-1],
                            sum=math.fsum(values),
                            mean=mean,
                            median=statistics.median(ordered),
                            variance=variance,
                            std_dev=math.sqrt(variance),
                            sample_variance=sample_variance,
                            sample_std_dev=math.sqrt(sample_variance))
