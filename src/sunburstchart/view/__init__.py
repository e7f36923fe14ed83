"""
The VIEW layer: Qt widgets drawing the chart computed by the model layer.
"""
