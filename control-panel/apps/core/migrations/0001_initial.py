# Initial schema for tenancy and audit events

import apps.core.common.models
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Organization',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255, unique=True)),
            ],
            options={
                'db_table': 'organizations',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Space',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='spaces', to='core.organization')),
            ],
            options={
                'db_table': 'spaces',
                'ordering': ['name'],
            },
        ),
        migrations.AddConstraint(
            model_name='space',
            constraint=models.UniqueConstraint(fields=('organization', 'name'), name='unique_space_name_per_org'),
        ),
        migrations.CreateModel(
            name='AuditEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(editable=False, max_length=255, unique=True)),
                ('type', models.CharField(db_index=True, max_length=255)),
                ('actor', models.CharField(max_length=255)),
                ('actor_type', models.CharField(max_length=255)),
                ('actor_name', models.CharField(blank=True, max_length=255)),
                ('actor_username', models.CharField(blank=True, max_length=255)),
                ('actee', models.CharField(db_index=True, max_length=255)),
                ('actee_type', models.CharField(max_length=255)),
                ('actee_name', models.CharField(blank=True, max_length=255)),
                ('space_guid', models.CharField(blank=True, db_index=True, max_length=255)),
                ('organization_guid', models.CharField(blank=True, max_length=255)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'audit_events',
                'ordering': ['timestamp', 'id'],
                'indexes': [
                    models.Index(fields=['actee', 'timestamp'], name='audit_events_actee_ts_idx'),
                    models.Index(fields=['type', 'timestamp'], name='audit_events_type_ts_idx'),
                ],
            },
        ),
    ]
