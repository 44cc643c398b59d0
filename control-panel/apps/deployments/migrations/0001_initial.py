# Initial schema for deployments and their historical processes

import apps.core.common.models
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('workloads', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Deployment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('state', models.CharField(choices=[('DEPLOYING', 'Deploying'), ('DEPLOYED', 'Deployed'), ('CANCELING', 'Canceling'), ('CANCELED', 'Canceled')], default='DEPLOYING', max_length=20)),
                ('deploying_web_process_guid', models.CharField(blank=True, max_length=255, null=True)),
                ('original_web_process_instance_count', models.PositiveIntegerField()),
                ('revision_guid', models.CharField(blank=True, max_length=255, null=True)),
                ('revision_version', models.PositiveIntegerField(blank=True, null=True)),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='deployments', to='workloads.app')),
                ('droplet', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='deployments', to='workloads.droplet')),
                ('previous_droplet', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='workloads.droplet')),
            ],
            options={
                'db_table': 'deployments',
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['app', 'state'], name='deployments_app_state_idx'),
                    models.Index(fields=['app', 'created_at'], name='deployments_app_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='HistoricalRelatedProcess',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('process_guid', models.CharField(max_length=255)),
                ('process_type', models.CharField(max_length=255)),
                ('deployment', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='historical_related_processes', to='deployments.deployment')),
            ],
            options={
                'db_table': 'deployment_processes',
                'ordering': ['created_at', 'id'],
                'verbose_name': 'Historical Related Process',
                'verbose_name_plural': 'Historical Related Processes',
            },
        ),
    ]
