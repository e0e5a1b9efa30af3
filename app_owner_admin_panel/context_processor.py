from django.conf import settings


def axes_cooloff(request):
    cooloff_time = settings.AXES_COOLOFF_TIME

    if isinstance(cooloff_time, int):
        # Whole numbers are hours
        if cooloff_time > 1:
            formatted_cooloff = f"{cooloff_time} hours"
        else:
            formatted_cooloff = f"{cooloff_time} hour"
    else:
        cooloff_minutes = int(float(cooloff_time) * 60)
        formatted_cooloff = f"{cooloff_minutes} minutes"

    return {'axes_cooloff_time': formatted_cooloff}
