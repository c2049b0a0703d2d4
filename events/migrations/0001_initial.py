from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(help_text='Title of the event', max_length=100)),
                ('slug', models.SlugField(help_text='URL identifier derived from the title', max_length=100, unique=True)),
                ('description', models.TextField(help_text='Full description of the event', max_length=1000)),
                ('overview', models.TextField(help_text='Short overview shown on event cards', max_length=500)),
                ('image', models.URLField(help_text='URL of the event image', max_length=500)),
                ('venue', models.CharField(help_text='Venue where the event takes place', max_length=255)),
                ('location', models.CharField(help_text='City or region of the event', max_length=255)),
                ('date', models.CharField(help_text='Event date (YYYY-MM-DD)', max_length=10)),
                ('time', models.CharField(help_text='Start time, 24-hour clock (HH:MM)', max_length=5)),
                ('mode', models.CharField(choices=[('online', 'Online'), ('offline', 'Offline'), ('hybrid', 'Hybrid')], help_text='Delivery format of the event', max_length=10)),
                ('audience', models.CharField(help_text='Who the event is for', max_length=255)),
                ('agenda', models.JSONField(default=list, help_text='Ordered list of agenda items')),
                ('organizer', models.TextField(help_text='Who organizes the event')),
                ('tags', models.JSONField(default=list, help_text='Lowercase tags')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='When this event was added to the system')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='When this event was last modified')),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['date', 'time'],
                'indexes': [models.Index(fields=['date', 'mode'], name='event_date_mode_idx')],
            },
        ),
    ]
